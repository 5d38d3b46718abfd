"""Test helpers for the wf-items test suite."""


def make_record(name: str, unique_name: str, **extra) -> dict:
    """Build a minimal valid item record in the export's JSON shape."""
    record = {"name": name, "uniqueName": unique_name, "tradable": True}
    record.update(extra)
    return record
