"""Periodic UPS status monitoring"""

import logging
import threading
from typing import Callable, List, Optional

from .client import NutClient
from .errors import NutError

logger = logging.getLogger(__name__)

UPS_STATUS = "ups.status"


class UPSStatusNotNormalError(Exception):
    """Custom exception for non-normal UPS status"""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"UPS status is not normal: {status}")


class StatusMonitor:
    """Polls the ``ups.status`` variable of one device and reports changes"""

    def __init__(
        self,
        client: NutClient,
        ups_name: str,
        normal_statuses: List[str],
        check_interval: int = 5,
        max_error_limits: int = 5,
        on_change: Optional[Callable[[Optional[str], str], None]] = None,
    ):
        self.client = client
        self.ups_name = ups_name
        self.normal_statuses = normal_statuses
        self.default_check_interval = check_interval
        self.check_interval = check_interval
        self.max_error_limits = max_error_limits
        self.on_change = on_change

        # Instance state
        self.monitoring_timer = None
        self.last_status: Optional[str] = None
        self.error_count = 0
        self.stopped = threading.Event()
        self.failed = False

    def check_status(self) -> str:
        """Read the current status, raising if it is not a normal one"""
        variable = self.client.get_device(self.ups_name).get_variable(UPS_STATUS)
        status = variable.get_value()
        if status not in self.normal_statuses:
            raise UPSStatusNotNormalError(status)
        return status

    def _record(self, status: str, normal: bool) -> None:
        if status == self.last_status:
            return
        if normal:
            logger.info("UPS status is normal (%s).", status)
        else:
            logger.warning("UPS status indicates power issue (%s).", status)
        previous, self.last_status = self.last_status, status
        if self.on_change is not None:
            try:
                self.on_change(previous, status)
            except Exception:
                logger.exception("Status change callback failed.")

    def run_check(self) -> None:
        """Run one check and schedule the next one"""
        if self.stopped.is_set():
            return

        try:
            status = self.check_status()
            self._record(status, normal=True)
            self._reschedule(self.default_check_interval)

        except UPSStatusNotNormalError as e:
            self._record(e.status, normal=False)
            self._reschedule(self.default_check_interval)

        except NutError:
            self.error_count += 1
            logger.exception(
                "Failed to check UPS status (%d/%d).",
                self.error_count,
                self.max_error_limits,
            )
            # backoff next check interval
            self._reschedule(self.check_interval * 2)

        except Exception:
            logger.exception("Unexpected error while checking UPS status.")
            self.failed = True
            self.stop()

        finally:
            if self.error_count > self.max_error_limits:
                logger.error("Too many errors. Giving up monitoring.")
                self.failed = True
                self.stop()

    def _reschedule(self, interval: int) -> None:
        self.check_interval = interval
        if self.stopped.is_set():
            return
        self.monitoring_timer = threading.Timer(self.check_interval, self.run_check)
        self.monitoring_timer.daemon = True
        self.monitoring_timer.start()

    def start(self) -> None:
        """Start monitoring with an immediate first check"""
        self.stopped.clear()
        self.run_check()

    def stop(self) -> None:
        """Cancel any scheduled check"""
        self.stopped.set()
        if self.monitoring_timer is not None:
            self.monitoring_timer.cancel()
            self.monitoring_timer = None
            logger.info("Cancelled scheduled monitoring.")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the monitor is stopped"""
        return self.stopped.wait(timeout)

    def signal_handler(self, signum, _frame):
        """Handle graceful shutdown on SIGINT and SIGTERM"""
        logger.info("Received signal %s. Gracefully shutting down...", signum)
        self.stop()
