"""
调度器管理模块
负责打开仓库后的延迟备份任务
"""
from datetime import datetime, timedelta
import pytz
from apscheduler.schedulers.background import BackgroundScheduler
from ..backup.trigger import TriggerSource
from ..host.log import logger

# 打开仓库后延迟执行备份，等待宿主完成仓库加载
OPEN_BACKUP_DELAY_SECONDS = 2

# 停止服务时等待当前备份任务的最长时间（秒）
STOP_WAIT_TIMEOUT = 300


class SchedulerManager:
    """调度器管理器类"""

    def __init__(self, plugin_instance):
        """
        初始化调度器管理器
        :param plugin_instance: AutoVaultBackup插件实例
        """
        self.plugin = plugin_instance
        self.plugin_name = plugin_instance.plugin_name
        self.job_id = f"{plugin_instance.__class__.__name__}_onopen"

    def setup_scheduler(self):
        """设置调度器，启用打开仓库时备份则添加一次性延迟任务"""
        if not self.plugin._settings.backup_on_open:
            return
        try:
            timezone = pytz.timezone(self.plugin.context.timezone)
            if not self.plugin._scheduler or not self.plugin._scheduler.running:
                self.plugin._scheduler = BackgroundScheduler(timezone=timezone)
            if self.plugin._scheduler.get_job(self.job_id):
                self.plugin._scheduler.remove_job(self.job_id)
            logger.info(f"{self.plugin_name} 仓库已打开，{OPEN_BACKUP_DELAY_SECONDS} 秒后执行备份")
            self.plugin._scheduler.add_job(
                func=self.plugin.run_backup_job,
                kwargs={"trigger": TriggerSource.ON_OPEN},
                trigger='date',
                run_date=datetime.now(tz=timezone) + timedelta(seconds=OPEN_BACKUP_DELAY_SECONDS),
                name=f"{self.plugin_name}打开仓库备份",
                id=self.job_id
            )
            if not self.plugin._scheduler.running:
                self.plugin._scheduler.start()
        except Exception as e:
            logger.error(f"启动 {self.plugin_name} 打开仓库备份任务失败: {str(e)}")

    def stop_scheduler(self):
        """停止调度器，等待正在执行的备份任务完成"""
        try:
            if self.plugin._lock and self.plugin._lock.locked():
                logger.info(f"等待 {self.plugin_name} 当前任务执行完成...")
                acquired = self.plugin._lock.acquire(timeout=STOP_WAIT_TIMEOUT)
                if acquired:
                    self.plugin._lock.release()
                else:
                    logger.warning(f"{self.plugin_name} 等待任务超时。")
            if self.plugin._scheduler:
                self.plugin._scheduler.remove_all_jobs()
                if self.plugin._scheduler.running:
                    self.plugin._scheduler.shutdown(wait=False)
                self.plugin._scheduler = None
                logger.info(f"{self.plugin_name} 服务已停止。")
        except Exception as e:
            logger.error(f"{self.plugin_name} 退出插件失败：{str(e)}")
