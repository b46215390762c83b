from schema_mysql.cli import main

main()
