import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from skillyaml.core import parse_string, serialize
from skillyaml.resources.database import Database


def verify_round_trip(name: str, record) -> bool:
    """A record must read back unchanged from its own serialized text."""
    text = serialize(record)
    return parse_string(text).to_dict() == record.to_dict()


def main(data_path: str | Path = "data") -> int:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("DataVerification")

    db = Database(Path(data_path))

    logger.info("Loading database...")
    db.load_all()

    failures = [
        name
        for store in (db.classes, db.skills)
        for name, record in store.items()
        if not verify_round_trip(name, record)
    ]

    if failures:
        logger.error(f"VERIFICATION FAILED: records do not round-trip: {', '.join(failures)}")
        return 1

    logger.info(
        f"VERIFICATION SUCCESSFUL: {len(db.classes)} classes and "
        f"{len(db.skills)} skills loaded and round-tripped."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "data"))
