"""
schema-mysql - Ponto de entrada de exemplo.

Execute com:
    python main.py

Imprime o CREATE TABLE de cada model em example/models.py.
Equivalente a:
    schema-mysql example.models:Base
"""

if __name__ == "__main__":
    from schema_mysql import SchemaToMysql
    from schema_mysql.reflection import tables_from_metadata
    from example.models import Base

    print(SchemaToMysql().script(tables_from_metadata(Base.metadata)))
