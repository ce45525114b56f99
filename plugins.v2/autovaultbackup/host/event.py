"""
事件定义模块
宿主向插件投递的命令事件
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class EventType(Enum):
    # 插件动作（命令、按钮等触发）
    PluginAction = "plugin.action"


@dataclass
class Event:
    event_type: EventType = EventType.PluginAction
    event_data: Dict[str, Any] = field(default_factory=dict)
