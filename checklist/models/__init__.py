from checklist.models.slot import StorageSlot, utcnow

__all__ = ["StorageSlot", "utcnow"]
