"""MySQL 磁盘容量巡检插件.

汇总 information_schema 中各 schema 的容量,与配置的磁盘容量及阈值比较,
按监控插件约定输出一行状态并返回退出码.
"""

__version__ = "1.0.0"
