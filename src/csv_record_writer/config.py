"""写出配置"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass


@dataclass
class WriterConfig:
    encoding: str = "utf-8"
    line_terminator: str | None = None       # None → os.linesep
    create_dirs: bool = True                 # 自动创建父目录

    @classmethod
    def from_dict(cls, raw: dict | None) -> "WriterConfig":
        """从 YAML 的 writer: 段构建，忽略未知键"""
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in (raw or {}).items() if k in known})
