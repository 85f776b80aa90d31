"""
Record store holding the ordered complaint list and mirroring it to local storage
"""
from typing import Iterable, List, Optional, Sequence, Set, Tuple
from pydantic import TypeAdapter, ValidationError
from complaint_reporter.config import get_settings
from complaint_reporter.models import Complaint, seed_complaints
from complaint_reporter.storage import LocalStorage
from complaint_reporter.logging_config import logger


_complaint_list = TypeAdapter(List[Complaint])


def serialize_complaints(records: Iterable[Complaint]) -> str:
    """Serialize complaints to JSON text, omitting absent photos"""
    return _complaint_list.dump_json(list(records), exclude_none=True).decode("utf-8")


def deserialize_complaints(text: str) -> List[Complaint]:
    """
    Parse JSON text back into complaints

    Raises:
        ValidationError: If the text is not a JSON list of valid complaints
    """
    return _complaint_list.validate_json(text)


class ComplaintStore:
    """Owns the complaint sequence and re-persists it whole after every mutation"""

    def __init__(self, storage: LocalStorage, storage_key: Optional[str] = None):
        """
        Initialize the record store

        Args:
            storage: Local storage backend
            storage_key: Storage slot name, defaults to settings.STORAGE_KEY
        """
        self.storage = storage
        self.storage_key = storage_key or get_settings().STORAGE_KEY
        self._records: Tuple[Complaint, ...] = ()

    @property
    def records(self) -> Tuple[Complaint, ...]:
        """Current snapshot, in insertion order"""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> List[Complaint]:
        """
        Rehydrate the store from local storage

        Falls back to the seed records, writing them to storage, when nothing is
        persisted yet or the persisted text cannot be parsed.

        Returns:
            The loaded complaint list
        """
        saved = self.storage.get_item(self.storage_key)

        if saved is not None:
            try:
                records = deserialize_complaints(saved)
                self._records = tuple(records)
                logger.info(f"Loaded {len(records)} complaints from local storage")
                return records
            except ValidationError as e:
                logger.error(f"Stored complaints under '{self.storage_key}' are corrupt, reseeding: {str(e)}")
        else:
            logger.info("No stored complaints found, initializing with sample data")

        records = seed_complaints()
        self._records = tuple(records)
        self.save(records)
        return records

    def save(self, records: Sequence[Complaint]) -> None:
        """Overwrite the persisted representation with the whole sequence"""
        self.storage.set_item(self.storage_key, serialize_complaints(records))
        logger.debug(f"Persisted {len(records)} complaints")

    def replace(self, records: Sequence[Complaint]) -> None:
        """Substitute the held sequence and persist it"""
        self._records = tuple(records)
        self.save(self._records)

    def append(self, complaint: Complaint) -> None:
        """Append a complaint at the end of the sequence and persist"""
        if complaint.id in self.ids():
            raise ValueError(f"Duplicate complaint id: {complaint.id}")

        self.replace(self._records + (complaint,))
        logger.info(f"Complaint appended, store size: {len(self._records)}", extra={'complaint_id': complaint.id})

    def ids(self) -> Set[str]:
        return {record.id for record in self._records}


def load_complaints(storage: LocalStorage, storage_key: Optional[str] = None) -> List[Complaint]:
    """Load the persisted complaints, seeding storage when empty"""
    return ComplaintStore(storage, storage_key).load()


def persist_complaints(storage: LocalStorage, records: Sequence[Complaint], storage_key: Optional[str] = None) -> None:
    """Overwrite the persisted complaints with records"""
    ComplaintStore(storage, storage_key).save(records)
