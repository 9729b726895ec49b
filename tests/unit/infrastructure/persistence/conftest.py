from tests.shared.fixtures.database import (  # noqa: F401
    db_engine,
    db_session,
    db_session_maker,
)
