# main.py
import logging
import sys

from .config import Config
from .display import DisplayTooSmall, open_display
from .loop import GameLoop

log = logging.getLogger(__name__)


def setup_logging(cfg: Config) -> None:
    # The terminal belongs to curses, so logs only go to a file when asked for
    if cfg.log_file:
        logging.basicConfig(
            filename=cfg.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger("termsnake").addHandler(logging.NullHandler())


def main() -> int:
    try:
        cfg = Config.from_env()
    except ValueError as exc:
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    setup_logging(cfg)

    try:
        with open_display(cfg) as display:
            GameLoop(display, cfg).run()
    except DisplayTooSmall as exc:
        log.error("%s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
    return 0

if __name__ == "__main__":
    sys.exit(main())
