"""服务层模块.

主要模块:
- connection_adapters: MySQL 连接适配器
- schema_usage_adapter: schema 容量汇总查询
- disk_usage_check_service: 磁盘容量巡检服务
"""

from .disk_usage_check_service import DiskUsageCheckService

__all__ = ["DiskUsageCheckService"]
