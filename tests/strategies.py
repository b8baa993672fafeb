"""Hypothesis strategies shared by the Loggo tests."""

from datetime import datetime, timezone

from hypothesis import strategies as st

from loggo.models import Activity, ActivityType, LogDocument, Note

ids = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Nd")),
    min_size=1,
    max_size=12,
)

timestamps = st.datetimes(
    min_value=datetime(2020, 1, 1),
    max_value=datetime(2030, 12, 31),
    timezones=st.just(timezone.utc),
)


def note_strategy():
    """Generate valid Note objects."""
    return st.builds(
        Note,
        id=ids,
        text=st.text(min_size=1, max_size=40).filter(lambda x: x.strip() != ""),
        timestamp=timestamps,
    )


def activity_strategy():
    """Generate valid Activity objects."""
    return st.builds(
        Activity,
        id=ids,
        type=st.sampled_from(list(ActivityType)),
        amount=st.floats(min_value=0.01, max_value=100000.0, allow_nan=False, allow_infinity=False),
        description=st.text(max_size=30),
        timestamp=timestamps,
    )


def document_strategy():
    """Generate LogDocuments with unique ids."""
    return st.builds(
        LogDocument,
        name=st.text(min_size=1, max_size=30).filter(lambda x: x.strip() != ""),
        notes=st.lists(note_strategy(), max_size=10, unique_by=lambda n: n.id),
        activities=st.lists(activity_strategy(), max_size=10, unique_by=lambda a: a.id),
    )
