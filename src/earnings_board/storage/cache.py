"""JSON snapshot of the last successful card board."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

import orjson
from pydantic import TypeAdapter, ValidationError

from earnings_board.core.exceptions import CacheLoadError, CacheWriteError
from earnings_board.core.logging import get_logger
from earnings_board.processing.models import DisplayCard

logger = get_logger(__name__)

_CARDS = TypeAdapter(list[DisplayCard])


class CardCache:
    """Single-document card store on the local filesystem.

    Writes go to a temporary sibling file that is then renamed over the
    target, so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> list[DisplayCard]:
        """Read the snapshot.

        Raises:
            CacheLoadError: If the file is unreadable, not JSON, or not an
                array of cards.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise CacheLoadError(f"Cannot read snapshot: {e}", self.path) from e

        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise CacheLoadError(f"Snapshot is not valid JSON: {e}", self.path) from e

        if not isinstance(data, list):
            raise CacheLoadError("Snapshot is not a JSON array", self.path)

        try:
            cards = _CARDS.validate_python(data)
        except ValidationError as e:
            raise CacheLoadError(
                f"Snapshot has {e.error_count()} invalid cards", self.path
            ) from e

        logger.debug("Snapshot loaded", path=str(self.path), count=len(cards))
        return cards

    def save(self, cards: Sequence[DisplayCard]) -> None:
        """Atomically replace the snapshot.

        Raises:
            CacheWriteError: If the file can't be written.
        """
        payload = orjson.dumps(
            [card.model_dump(mode="json") for card in cards],
            option=orjson.OPT_INDENT_2,
        )
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheWriteError(f"Cannot write snapshot: {e}", self.path) from e

        logger.debug("Snapshot saved", path=str(self.path), count=len(cards))
