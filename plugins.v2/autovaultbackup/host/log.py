"""
日志模块
插件内所有模块共用的日志记录器
"""
import logging

logger = logging.getLogger("autovaultbackup")
logger.addHandler(logging.NullHandler())
