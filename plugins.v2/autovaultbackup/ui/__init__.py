"""
UI界面模块
包含设置表单、页面构建和历史记录管理
"""
from .form_builder import FormBuilder
from .page_builder import PageBuilder
from .history_manager import HistoryManager

__all__ = ['FormBuilder', 'PageBuilder', 'HistoryManager']
