from enum import Enum


class TableStatus(Enum):
    CREATING = "CREATING"
    UPDATING = "UPDATING"
    DELETING = "DELETING"
    ACTIVE = "ACTIVE"
    INACCESSIBLE_ENCRYPTION_CREDENTIALS = "INACCESSIBLE_ENCRYPTION_CREDENTIALS"
    ARCHIVING = "ARCHIVING"
    ARCHIVED = "ARCHIVED"

    @staticmethod
    def of(description):
        """
        Status of a table description, or None if the table is absent or reports an unknown status
        """
        if not description or 'TableStatus' not in description:
            return None
        try:
            return TableStatus(description['TableStatus'])
        except ValueError:
            return None
