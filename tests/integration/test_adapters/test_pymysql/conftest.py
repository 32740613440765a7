"""Shared fixtures for PyMySQL integration tests."""

from collections.abc import Generator

import pytest
from pytest_databases.docker.mysql import MySQLService

from emysql.adapters.pymysql import PyMysqlConfig, PyMysqlDriver


@pytest.fixture(scope="session")
def pymysql_config(mysql_service: "MySQLService") -> PyMysqlConfig:
    return PyMysqlConfig(
        connection_config={
            "host": mysql_service.host,
            "port": mysql_service.port,
            "user": mysql_service.user,
            "password": mysql_service.password,
            "database": mysql_service.db,
            "autocommit": True,
        }
    )


@pytest.fixture
def pymysql_driver(pymysql_config: PyMysqlConfig) -> "Generator[PyMysqlDriver, None, None]":
    with pymysql_config.provide_session() as driver:
        driver.execute("DROP TABLE IF EXISTS contacts_emysql")
        driver.execute(
            """
            CREATE TABLE contacts_emysql (
                contacts_id INT AUTO_INCREMENT PRIMARY KEY,
                first_name VARCHAR(255),
                last_name VARCHAR(255),
                email VARCHAR(255),
                note TEXT
            )
            """
        )
        yield driver
        driver.execute("DROP TABLE IF EXISTS contacts_emysql")
