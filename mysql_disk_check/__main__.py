from mysql_disk_check.cli import run

run()
