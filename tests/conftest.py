"""测试共用的宿主替身"""

import shutil
import tempfile
from pathlib import Path
from typing import List, Tuple

import pytest

from symlink_toggle.core.interfaces.surface import INotifier, IStatusSurface, NoticeLevel


class RecordingNotifier(INotifier):
    """记录所有通知"""

    def __init__(self):
        self.notices: List[Tuple[str, NoticeLevel]] = []

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self.notices.append((message, level))

    @property
    def messages(self) -> List[str]:
        return [message for message, _ in self.notices]

    @property
    def errors(self) -> List[str]:
        return [message for message, level in self.notices if level == NoticeLevel.ERROR]


class RecordingStatusSurface(IStatusSurface):
    """记录状态栏文本历史"""

    def __init__(self):
        self.history: List[str] = []

    def set_text(self, text: str) -> None:
        self.history.append(text)

    @property
    def text(self) -> str:
        return self.history[-1] if self.history else ""


@pytest.fixture
def temp_dir():
    """创建临时目录，包含 vault/ 和 data/real/ 两个子目录"""
    temp_path = Path(tempfile.mkdtemp())
    (temp_path / "vault").mkdir()
    (temp_path / "data" / "real").mkdir(parents=True)
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def vault_dir(temp_dir):
    return temp_dir / "vault"


@pytest.fixture
def target_dir(temp_dir):
    return temp_dir / "data" / "real"


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def status_surface():
    return RecordingStatusSurface()
