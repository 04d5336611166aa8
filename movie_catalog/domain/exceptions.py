class DomainError(Exception):
    pass


class ValidationError(DomainError):
    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(", ".join(f"{field}: {message}" for field, message in errors.items()))


class NotFoundError(DomainError):
    pass


class AlreadyExistsError(DomainError):
    pass


class MovieNotFoundError(NotFoundError):
    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__(f"Movie not found with id: {movie_id}")


class MovieAlreadyExistsError(AlreadyExistsError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Movie with title '{title}' already exists")
