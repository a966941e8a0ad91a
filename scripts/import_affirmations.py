import argparse
import asyncio
import json
from pathlib import Path
from typing import List, Generator, Optional, TypeVar

from pydantic import ValidationError

from affirmations.db.session import SessionLocal
from affirmations.schemas.affirmation import AffirmationCreate
from affirmations.services.affirmation_service import AffirmationService
from affirmations.services.collection_service import CollectionService

T = TypeVar('T')


def batch_list(list_: List[T], n: int = 10) -> Generator[List[T], None, None]:
    for i in range(0, len(list_), n):
        yield list_[i:i+n]


def load_entries(path: Path, collection_id: Optional[str] = None) -> List[AffirmationCreate]:
    """Read affirmations from a JSON list (strings or objects) or a text file with one per line.

    ``collection_id`` overrides any collection given by the entries themselves.
    """
    content = path.read_text(encoding="utf-8")

    if path.suffix.lower() == ".json":
        raw = json.loads(content)
        if not isinstance(raw, list):
            raise ValueError(f"`{path}` must contain a JSON list.")
    else:
        raw = [line.strip() for line in content.splitlines() if line.strip()]

    entries: List[AffirmationCreate] = []
    for index, item in enumerate(raw, start=1):
        fields = {"text": item} if isinstance(item, str) else dict(item)
        if collection_id is not None:
            fields["collectionId"] = collection_id
            fields.pop("collection_id", None)

        try:
            entries.append(AffirmationCreate.model_validate(fields))
        except ValidationError as e:
            raise ValueError(f"Entry {index} in `{path}` is invalid: {e}") from e

    return entries


async def import_affirmations(
    user_id: str,
    file_path: Path,
    collection_id: Optional[str] = None,
    batch_size: int = 100,
    session_factory=SessionLocal,
) -> int:
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}.")

    print("[import] start")
    print(f"[import] file={file_path} batch_size={batch_size}")

    entries = load_entries(file_path, collection_id)
    print(f"[scan] entries_found={len(entries)}")

    total_written = 0

    async with session_factory() as db:
        referenced = {entry.collection_id for entry in entries if entry.collection_id}
        for referenced_id in referenced:
            await CollectionService.get_owned(db, user_id, referenced_id)
        print(f"[db] collections_checked={len(referenced)}")

        batches = list(batch_list(entries, batch_size))
        for idx, batch in enumerate(batches, start=1):
            try:
                db.add_all([AffirmationService.build(user_id, entry) for entry in batch])
                await db.commit()

            except Exception as e:
                await db.rollback()
                msg = str(e)
                if len(msg) > 200:
                    msg = msg[:200] + "...(truncated)"
                print(f"[batch {idx}] ERROR {e.__class__.__name__}: {msg}")
                raise

            total_written += len(batch)
            print(f"[batch {idx}/{len(batches)}] written={len(batch)}")

    print(f"[import] done written={total_written}")
    return total_written


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Import affirmations for a user from a JSON or text file. "
                    "Rows are written in batches through the regular service layer."
    )
    parser.add_argument(
        "--user",
        required=True,
        help="Identity-provider id of the owning user."
    )
    parser.add_argument(
        "--file",
        required=True,
        type=Path,
        help="JSON list of affirmations, or a text file with one affirmation per line."
    )
    parser.add_argument(
        "--collection",
        default=None,
        help="Id of a collection owned by the user to import into."
    )
    parser.add_argument(
        "--batch-size",
        type=positive_int,
        default=100,
        help="Number of affirmations committed per transaction."
    )
    return parser


if __name__ == '__main__':
    args = build_parser().parse_args()

    asyncio.run(import_affirmations(
        args.user,
        args.file,
        collection_id=args.collection,
        batch_size=args.batch_size
    ))
