from .ids import new_entity_id, new_uuid
from .kinds import is_folder, is_openable_container

__all__ = [
    "new_uuid",
    "new_entity_id",
    "is_folder",
    "is_openable_container",
]
