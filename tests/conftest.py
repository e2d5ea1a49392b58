import os


# 避免开发者本机环境变量影响测试
for _name in list(os.environ):
    if _name.startswith("MYSQL_DISK_"):
        del os.environ[_name]
