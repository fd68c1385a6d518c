"""
Resume import exceptions and their caller-facing recovery mapping.

Acquisition failures are raised to the caller; extraction misses never are.
"""
from dataclasses import dataclass
from enum import Enum


class ResumeImportException(Exception):
    """Base exception for resume import failures."""
    pass


class DocumentReadError(ResumeImportException):
    """Raised when the PDF cannot be opened or read."""
    pass


class EmptyTextError(ResumeImportException):
    """Raised when text extraction and OCR both yield below-threshold text."""

    def __init__(self, message: str, partial_text: str = ""):
        super().__init__(message)
        self.partial_text = partial_text


class ImportTimeoutError(ResumeImportException, TimeoutError):
    """Raised when the extraction call exceeds its time budget."""
    pass


class RecoveryAction(str, Enum):
    ABORT = "abort"
    MANUAL_PASTE = "manual_paste"
    RETRY = "retry"


@dataclass(frozen=True)
class RecoveryPrompt:
    action: RecoveryAction
    message_en: str
    message_zh: str

    def message(self, language: str) -> str:
        return self.message_zh if language == "zh" else self.message_en


_RECOVERY_PROMPTS = {
    DocumentReadError: RecoveryPrompt(
        RecoveryAction.ABORT,
        "Import failed: the file could not be read.",
        "导入失败：文件读取错误。",
    ),
    EmptyTextError: RecoveryPrompt(
        RecoveryAction.MANUAL_PASTE,
        "Too little text could be extracted; the PDF may be a scanned image. "
        "Paste the resume text manually instead?",
        "提取的文本内容过少，该 PDF 可能是纯图片扫描件。是否尝试手动粘贴文本进行解析？",
    ),
    ImportTimeoutError: RecoveryPrompt(
        RecoveryAction.RETRY,
        "Import timed out. Please retry, or paste the text manually.",
        "导入超时，请重试，或手动粘贴文本。",
    ),
}


def recovery_for(exc: ResumeImportException) -> RecoveryPrompt:
    """Map an import failure to the recovery prompt shown to the user."""
    for exc_type, prompt in _RECOVERY_PROMPTS.items():
        if isinstance(exc, exc_type):
            return prompt
    raise ValueError(f"No recovery prompt for {type(exc).__name__}")
