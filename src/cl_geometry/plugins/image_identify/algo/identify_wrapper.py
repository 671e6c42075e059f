"""ImageMagick ``identify`` wrapper for reading image dimensions.

ImageMagick must be installed separately: https://imagemagick.org/
"""

import subprocess
from pathlib import Path
from typing import cast

from loguru import logger

from ....config import get_settings
from ....geometry.errors import CommandNotFoundError, NotIdentifiableError

DIMENSIONS_FORMAT = "%wx%h"


class IdentifyWrapper:
    """Runs ``identify -format %wx%h <file>[0]`` and returns its raw output."""

    def __init__(self, binary: str | None = None, timeout: float | None = None) -> None:
        settings = get_settings()
        self.binary: str = binary or settings.identify_binary
        self.timeout: float = timeout or settings.probe_timeout

    def is_available(self) -> bool:
        try:
            result = subprocess.run(
                [self.binary, "-version"],
                check=True,
                capture_output=True,
                text=True,
                timeout=5,
            )
            first_line = result.stdout.strip().splitlines()[0] if result.stdout.strip() else ""
            logger.debug(f"ImageMagick found: {first_line}")
            return True
        except (FileNotFoundError, subprocess.CalledProcessError, subprocess.TimeoutExpired):
            return False

    def command(self, filepath: str | Path) -> list[str]:
        # [0] restricts identify to the first frame of animated or multi-page files
        return [self.binary, "-format", DIMENSIONS_FORMAT, f"{filepath}[0]"]

    def probe(self, filepath: str | Path | None) -> str:
        """Return identify's ``WxH`` report for ``filepath``.

        Returns an empty string when identify rejects the file, so that the
        caller turns it into a ``NotIdentifiableError``.

        Raises:
            NotIdentifiableError: If ``filepath`` is blank or does not exist
            CommandNotFoundError: If the identify binary cannot be executed
        """
        if filepath is None or not str(filepath).strip():
            raise NotIdentifiableError("Cannot find the geometry of a file with a blank name")

        path = Path(filepath)
        if not path.exists():
            raise NotIdentifiableError(f"Cannot find the geometry of a missing file: {path}")

        command = self.command(path)
        logger.debug(f"Running {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise CommandNotFoundError(
                f"Could not run the `{self.binary}` command. Please install ImageMagick."
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = cast(str, exc.stderr) if exc.stderr is not None else ""  # pyright: ignore[reportAny]
            logger.error(f"identify failed for {path}: {stderr.strip()}")
            return ""
        except subprocess.TimeoutExpired:
            logger.error(f"identify timed out after {self.timeout}s for {path}")
            return ""

        return result.stdout.strip()
