"""Entry point: python -m tmpsize <command>

- set SIZE:          Persist SIZE and remount /tmp ("" unsets)
- unset:             Drop the override and remount /tmp with the default
- prepare ROOT SIZE: Write the override into an image root, no remount
- show:              Print the persisted size
- check SIZE:        Validate SIZE only
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from tmpsize.apply import TMP_SIZE_KEY, filesystem_only_apply, run, validate_tmp_size
from tmpsize.config import TmpSizeConfig, load_config
from tmpsize.errors import TmpSizeError
from tmpsize.fragment import fragment_path, read_fragment_size
from tmpsize.size import DEFAULT_SIZE

logger = logging.getLogger("tmpsize")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _usage() -> int:
    print("Usage: python -m tmpsize <command>")
    print("  set SIZE           Persist SIZE and remount /tmp")
    print("  unset              Remove the override, remount with the default")
    print("  prepare ROOT SIZE  Write the override under ROOT, no remount")
    print("  show               Print the configured size")
    print("  check SIZE         Validate SIZE without applying it")
    return 1


def _show(config: TmpSizeConfig) -> None:
    size = read_fragment_size(fragment_path(config.root_dir))
    print(size if size is not None else f"{DEFAULT_SIZE} (default)")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cmd, rest = (args[0], args[1:]) if args else ("", [])

    config = load_config()
    _setup_logging(config.log_level)

    try:
        if cmd == "set" and len(rest) == 1:
            run({TMP_SIZE_KEY: rest[0]}, config)
        elif cmd == "unset" and not rest:
            run({TMP_SIZE_KEY: ""}, config)
        elif cmd == "prepare" and len(rest) == 2:
            filesystem_only_apply(Path(rest[0]), {TMP_SIZE_KEY: rest[1]})
        elif cmd == "show" and not rest:
            _show(config)
        elif cmd == "check" and len(rest) == 1:
            validate_tmp_size({TMP_SIZE_KEY: rest[0]})
        else:
            return _usage()
    except (TmpSizeError, OSError) as e:
        logger.debug("%s failed", cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
