import threading
from typing import Any, List, Dict, Tuple, Optional

import pytz
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from .host.event import Event
from .host.log import logger
from .host.plugin_base import HostContext, PluginBase

from .config.loader import ConfigLoader
from .config.manager import ConfigManager
from .config.settings import BackupSettings
from .backup.backup_executor import BackupExecutor, BackupResult
from .backup.trigger import TriggerSource
from .ui.form_builder import FormBuilder
from .ui.page_builder import PageBuilder
from .ui.history_manager import HistoryManager
from .notification.service import NotificationService
from .scheduler.manager import SchedulerManager
from .core.event_handler import VaultEventHandler
from .api.commands import get_plugin_commands, get_ribbon_icons
from .api.routes import get_api_routes


class AutoVaultBackup(PluginBase):
    # 插件名称
    plugin_name = "仓库自动备份"
    # 插件描述
    plugin_desc = "定时将仓库文档和附件打包为带时间戳的 zip 备份，并按数量清理旧备份"
    # 插件图标
    plugin_icon = "download"
    # 插件版本
    plugin_version = "1.0.0"
    # 插件配置项ID前缀
    plugin_config_prefix = "autovaultbackup_"
    # 加载顺序
    plugin_order = 10

    # 私有属性
    _scheduler: Optional[BackgroundScheduler] = None
    _lock: Optional[threading.Lock] = None
    _running: bool = False
    _max_history_entries: int = 100

    # 配置
    _settings: BackupSettings = BackupSettings()

    def init_plugin(self, config: Optional[dict] = None):
        if self._lock is None:
            self._lock = threading.Lock()

        # 初始化管理器
        self._config_loader = ConfigLoader(self)
        self._config_manager = ConfigManager(self)
        self._form_builder = FormBuilder(self)
        self._page_builder = PageBuilder(self)
        self._history_manager = HistoryManager(self, self._max_history_entries)
        self._notification_service = NotificationService(self)
        self._event_handler = VaultEventHandler(self)
        self._scheduler_manager = SchedulerManager(self)
        self._backup_executor = BackupExecutor(self)

        self.stop_service()

        self._config_loader.load_config(config)
        if config is not None:
            self._config_manager.update_config()

        # 打开仓库时备份
        self._scheduler_manager.setup_scheduler()

    @property
    def settings(self) -> BackupSettings:
        return self._settings

    def get_state(self) -> bool:
        return True

    def get_command(self) -> List[Dict[str, Any]]:
        """注册命令面板命令"""
        return get_plugin_commands()

    def get_ribbon(self) -> List[Dict[str, Any]]:
        """注册侧边栏图标"""
        return get_ribbon_icons(self)

    def get_api(self) -> List[Dict[str, Any]]:
        """注册插件API（使用routes模块）"""
        return get_api_routes(self)

    def get_service(self) -> List[Dict[str, Any]]:
        cron = self._settings.cron
        if not cron:
            return []
        try:
            if len(cron.split()) == 5:
                return [{
                    "id": "AutoVaultBackupService",
                    "name": f"{self.plugin_name}定时服务",
                    "trigger": CronTrigger.from_crontab(cron, timezone=pytz.timezone(self.context.timezone)),
                    "func": self.run_backup_job,
                    "kwargs": {"trigger": TriggerSource.SCHEDULED}
                }]
            else:
                logger.error(f"{self.plugin_name} cron表达式格式错误: {cron}")
                return []
        except Exception as err:
            logger.error(f"{self.plugin_name} 定时任务配置错误：{str(err)}")
            return []

    def get_form(self) -> Tuple[List[dict], Dict[str, Any]]:
        """使用FormBuilder构建表单"""
        return self._form_builder.build_form()

    def get_page(self) -> List[dict]:
        """使用PageBuilder构建页面"""
        return self._page_builder.build_page()

    def save_settings(self, values: Optional[dict] = None) -> BackupSettings:
        """保存设置面板的修改"""
        return self._config_manager.apply_changes(values)

    def stop_service(self):
        """委托给SchedulerManager停止服务"""
        if hasattr(self, '_scheduler_manager'):
            self._scheduler_manager.stop_scheduler()

    def on_vault_close(self) -> Optional[BackupResult]:
        """宿主关闭仓库时调用"""
        if not self._settings.backup_on_close:
            return None
        return self.run_backup_job(trigger=TriggerSource.ON_CLOSE)

    def run_backup_job(self, trigger: TriggerSource = TriggerSource.MANUAL) -> Optional[BackupResult]:
        """执行备份任务（使用BackupExecutor）"""
        return self._backup_executor.run_backup_job(trigger)

    def _send_notification(self, success: bool, filename: Optional[str] = None):
        """发送通知"""
        self._notification_service.send_notification(success=success, filename=filename)

    def handle_command(self, event: Event = None) -> bool:
        """处理命令事件"""
        return self._event_handler.handle_command(event)


__all__ = ['AutoVaultBackup', 'HostContext', 'TriggerSource', 'BackupSettings', 'BackupResult']
