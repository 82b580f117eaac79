"""MySQL operators for flatorm."""

from flatorm.operators.mysql.connector import MySQLConnector
from flatorm.operators.mysql.generator import MySQLGenerator
from flatorm.operators.mysql.type_mapper import MySQLTypeMapper

__all__ = ["MySQLConnector", "MySQLGenerator", "MySQLTypeMapper"]
