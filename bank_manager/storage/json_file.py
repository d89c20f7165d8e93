"""JSON file storage for whole-directory snapshots."""

import json
from pathlib import Path

from bank_manager.exceptions import SnapshotError
from bank_manager.generators.identifier import IdentifierGenerator
from bank_manager.logging import get_logger
from bank_manager.storage.serialization import directory_from_dict, directory_to_dict
from bank_manager.store.directory import BankDirectory

logger = get_logger(__name__)


class JsonFileStorage:
    """Load and save the full bank directory as one JSON document.

    Last writer wins; there is no locking or journaling.
    """

    def __init__(
        self,
        path: str | Path,
        pretty: bool = False,
        id_generator: IdentifierGenerator | None = None,
    ) -> None:
        """Initialize JSON file storage.

        Parameters
        ----------
        path : str | Path
            Snapshot file location.
        pretty : bool
            Pretty-print JSON output.
        id_generator : IdentifierGenerator | None
            Generator attached to loaded directories.
        """
        self.path = Path(path)
        self.pretty = pretty
        self.id_generator = id_generator

    def load(self) -> BankDirectory | None:
        """Read the snapshot, ``None`` if it is missing or unreadable."""
        if not self.path.exists():
            logger.info("No snapshot at %s, starting with an empty directory", self.path)
            return None

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            directory = directory_from_dict(data, id_generator=self.id_generator)
        except (OSError, ValueError, RecursionError, SnapshotError) as exc:
            logger.warning("Could not load snapshot %s: %s", self.path, exc)
            return None

        logger.info("Loaded %d banks from %s", directory.size(), self.path)
        return directory

    def save(self, directory: BankDirectory) -> bool:
        """Write the snapshot, ``False`` on any I/O failure.

        The document is written to a sibling ``.tmp`` file and then moved
        over the snapshot. A failed save leaves the previous snapshot as is.
        """
        data = directory_to_dict(directory)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as exc:
            logger.error("Could not save snapshot %s: %s", self.path, exc)
            tmp_path.unlink(missing_ok=True)
            return False

        logger.info("Saved %d banks to %s", directory.size(), self.path)
        return True
