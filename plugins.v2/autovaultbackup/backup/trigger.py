"""
备份触发来源定义
"""
from enum import Enum


class TriggerSource(Enum):
    ON_OPEN = "on_open"
    ON_CLOSE = "on_close"
    MANUAL = "manual"
    SCHEDULED = "scheduled"

    @property
    def desc(self) -> str:
        return {
            TriggerSource.ON_OPEN: "打开仓库",
            TriggerSource.ON_CLOSE: "关闭仓库",
            TriggerSource.MANUAL: "手动",
            TriggerSource.SCHEDULED: "定时",
        }[self]
