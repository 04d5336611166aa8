import logging
from typing import Optional


def setup_logging(level: str = "INFO", noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                          datefmt='%Y-%m-%d %H:%M:%S')
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    if noisy_libs is not None:
        for lib, lib_level in noisy_libs.items():
            logging.getLogger(lib).setLevel(lib_level)
