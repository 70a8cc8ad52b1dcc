from school_attendance.database.bootstrap import SCHEMA_PATH, _strip_create_db_and_use, iter_sql_statements
from school_attendance.database.mysql_base import escape_like, in_clause


def test_splitter_respects_quotes_and_comments():
    sql = """
    -- comment; not a statement
    INSERT INTO t VALUES ('a;b');
    UPDATE t SET x = "c;d";
    SELECT 1
    """
    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'UPDATE t SET x = "c;d"',
        "SELECT 1",
    ]


def test_schema_file_creates_all_tables():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))
    assert not any(s.upper().startswith(("USE", "CREATE DATABASE")) for s in statements)
    joined = "\n".join(statements)
    for table in (
        "user_profiles",
        "perizinan",
        "attendance_settings",
        "absences",
        "attendance_default_hours",
        "attendance_special_days",
    ):
        assert f"CREATE TABLE IF NOT EXISTS {table}" in joined


def test_sql_helpers():
    assert in_clause(["user", "admin"]) == "%s, %s"
    assert escape_like("50%_off") == "50\\%\\_off"
