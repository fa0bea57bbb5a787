from __future__ import annotations

from src.school_ops.school_ops.database.connection import DBConfig, DatabaseConnection


def test_get_instance_is_shared_per_configuration():
    main_db = DBConfig.from_dict({"host": "db", "database": "school_ops"})
    test_db = DBConfig.from_dict({"host": "db", "database": "school_ops_test"})

    first = DatabaseConnection.get_instance(main_db)

    assert DatabaseConnection.get_instance(DBConfig.from_dict({"host": "db", "database": "school_ops"})) is first
    assert DatabaseConnection.get_instance(test_db) is not first
    assert DatabaseConnection.get_instance(test_db)._config == test_db
