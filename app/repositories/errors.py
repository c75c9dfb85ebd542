"""
Repository-level exceptions.

These describe what the store reported; the service decides what
they mean to a caller.
"""


class RecordNotFoundError(LookupError):
    """A delete-by-id matched no row."""

    def __init__(self, table: str, record_id):
        super().__init__(f"No {table} row with id {record_id}")
        self.table = table
        self.record_id = record_id
