from __future__ import annotations

import logging
import subprocess
import threading

from .runner import CommandError, CommandRunner

logger = logging.getLogger(__name__)

TERMINATE_GRACE = 2.0


class BackgroundScan:
    """Time-boxed discovery running beside the menu.

    The scan powers the adapter on, keeps `scan on` running for `duration`
    seconds (or until stopped), then turns discovery off again. Its results
    are only ever observed by re-listing devices.
    """

    def __init__(self, runner: CommandRunner, command: str, duration: float) -> None:
        self._runner = runner
        self._command = command
        self._duration = duration
        self._lock = threading.Lock()
        self._cancel = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self.running:
                logger.debug("Scan already running")
                return
            self._cancel = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._cancel,),
                name="bluetooth-scan",
                daemon=True,
            )
            self._thread.start()
        logger.info("Started background scan for %.1fs", self._duration)

    def stop(self, wait: bool = True) -> None:
        with self._lock:
            thread = self._thread
            self._cancel.set()
        if wait and thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self._duration + TERMINATE_GRACE * 2)

    def _run(self, cancel: threading.Event) -> None:
        try:
            self._runner.run(self._command, "power", "on")
            process = self._runner.spawn(self._command, "scan", "on")
        except CommandError as exc:
            logger.warning("Could not start scan: %s", exc)
            return

        try:
            cancelled = cancel.wait(self._duration)
            logger.debug("Scan %s", "cancelled" if cancelled else "finished")
        finally:
            _terminate(process)
            try:
                self._runner.run(self._command, "scan", "off")
            except CommandError as exc:
                logger.warning("Could not stop discovery: %s", exc)


def _terminate(process: subprocess.Popen[bytes]) -> None:
    if process.poll() is not None:
        return
    process.terminate()
    try:
        process.wait(timeout=TERMINATE_GRACE)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()
