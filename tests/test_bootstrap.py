from src.leave_dashboard.leave_dashboard.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_iter_sql_statements_ignores_semicolons_in_quotes():
    sql = """
    CREATE TABLE a (name VARCHAR(10) DEFAULT ';');
    INSERT INTO a VALUES ("x;y"), ('it\\'s;');

    SELECT 1
    """

    statements = list(iter_sql_statements(sql))

    assert statements == [
        "CREATE TABLE a (name VARCHAR(10) DEFAULT ';')",
        "INSERT INTO a VALUES (\"x;y\"), ('it\\'s;')",
        "SELECT 1",
    ]


def test_strip_create_db_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE t (id INT);"
    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
