"""
Exemplo de uso do schema-mysql.

Esta aplicação demonstra:
- Models SQLAlchemy com tipos inteiros, texto, enum e datas
- Índices únicos com prefix length (mysql_length)
- Opções de tabela MySQL (mysql_engine, mysql_charset)
"""
