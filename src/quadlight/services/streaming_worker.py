"""
Streaming worker - the consumer loop between the frame cursor and the device

State machine:

    DISCONNECTED ──open()──► CONNECTING ──handle──► CONNECTED
         ▲                       │                      │
         └──── open failed ──────┘◄──── write failed ───┘
               (wait backoff)          (close handle)

Cadence is set entirely by the transport: the loop writes the next frame as
soon as the previous write returns.
"""

import threading
from typing import Any, Callable, List, Optional

from quadlight.engine.frame_cursor import FrameCursor
from quadlight.hardware.transport_interface import ITransport
from quadlight.managers.config_manager import StreamConfig
from quadlight.models.enums import ConnectionState, LogCategory
from quadlight.utils.logger import get_logger

log = get_logger().for_category(LogCategory.TRANSPORT)

StateListener = Callable[[ConnectionState], None]


class WorkerStillRunningError(RuntimeError):
    """A timed-out stop() left the previous loop alive"""


class StreamingWorker:
    """
    Background thread that keeps a device handle open and streams frames.

    Example:
        worker = StreamingWorker(cursor, create_transport(config.device))
        worker.add_listener(lambda state: print(state.name))
        worker.start()
        ...
        worker.stop()
    """

    def __init__(
        self,
        cursor: FrameCursor,
        transport: ITransport,
        config: Optional[StreamConfig] = None,
        thread_name: str = "QC2S-Worker",
    ):
        self.cursor = cursor
        self.transport = transport
        self.config = config or StreamConfig()
        self.thread_name = thread_name

        self._state = ConnectionState.DISCONNECTED
        self._state_lock = threading.Lock()
        self._listeners: List[StateListener] = []

        self._handle: Optional[Any] = None
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._lifecycle_lock = threading.Lock()

        self.frames_written = 0
        self.failed_connects = 0

    # ------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------

    @property
    def state(self) -> ConnectionState:
        with self._state_lock:
            return self._state

    @property
    def connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _set_state(self, new_state: ConnectionState) -> None:
        with self._state_lock:
            if self._state is new_state:
                return
            old_state, self._state = self._state, new_state

        log.debug(f"Connection {old_state.name} → {new_state.name}")
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception as ex:
                log.error("State listener failed", listener=repr(listener), error=str(ex))

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def start(self) -> None:
        """
        Start the worker thread (no-op if already running).

        Raises:
            WorkerStillRunningError: if a previous stop() timed out and its
                thread is still alive; a second loop would write concurrently
        """
        with self._lifecycle_lock:
            if self.running:
                if self._stop_event.is_set():
                    raise WorkerStillRunningError("Previous streaming thread has not exited yet")
                return
            self._stop_event.clear()
            self.failed_connects = 0
            self._thread = threading.Thread(
                target=self._run,
                name=self.thread_name,
                daemon=True,
            )
            self._thread.start()
        log.info("Streaming worker started")

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the thread, close the device, report DISCONNECTED."""
        with self._lifecycle_lock:
            self._stop_event.set()
            thread = self._thread
            if thread is not None and thread is not threading.current_thread():
                thread.join(timeout=timeout)
                if thread.is_alive():
                    # keep the reference so start() can refuse to run a second loop
                    log.warn("Streaming worker did not stop in time", timeout=timeout)
                else:
                    self._thread = None
            self._close_handle()
        self._set_state(ConnectionState.DISCONNECTED)
        log.info("Streaming worker stopped", frames_written=self.frames_written)

    def reconnect(self) -> None:
        self.stop()
        self.start()

    # ------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------

    def _run(self) -> None:
        while not self._stop_event.is_set():
            if self._handle is None:
                if not self._connect():
                    if self._attempts_exhausted():
                        log.error(
                            "Giving up on device",
                            attempts=self.failed_connects,
                        )
                        self._stop_event.set()
                        break
                    self._stop_event.wait(self.config.retry_backoff_s)
                continue

            frame = self.cursor.next_frame()
            if self.transport.write(self._handle, frame.upper, frame.lower):
                self.frames_written += 1
            else:
                log.warn("Device write failed, disconnecting")
                self._close_handle()
                self._set_state(ConnectionState.DISCONNECTED)

    def _connect(self) -> bool:
        self._set_state(ConnectionState.CONNECTING)
        handle = self.transport.open()
        if handle is None:
            self.failed_connects += 1
            self._set_state(ConnectionState.DISCONNECTED)
            return False

        if self._stop_event.is_set():
            self.transport.close(handle)
            return False

        self._handle = handle
        self.failed_connects = 0
        self._set_state(ConnectionState.CONNECTED)
        log.info("Device connected")
        return True

    def _attempts_exhausted(self) -> bool:
        limit = self.config.max_connect_attempts
        return limit is not None and self.failed_connects >= limit

    def _close_handle(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            self.transport.close(handle)
