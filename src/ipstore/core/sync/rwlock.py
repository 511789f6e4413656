"""
读写锁
多个读者可以同时持有，写者独占；有写者等待时新读者让路
"""
import threading
from contextlib import contextmanager


class ReadWriteLock:
    """基于 threading.Condition 的读写锁（不可重入）"""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        """获取共享锁"""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        """释放共享锁"""
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("释放了未持有的读锁")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        """获取独占锁"""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        """释放独占锁"""
        with self._cond:
            if not self._writer:
                raise RuntimeError("释放了未持有的写锁")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        """with 语句中持有共享锁"""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        """with 语句中持有独占锁"""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """当前持有读锁的数量"""
        with self._cond:
            return self._readers

    @property
    def write_held(self) -> bool:
        """写锁是否被持有"""
        with self._cond:
            return self._writer
