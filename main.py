"""
文本人性化改写API服务主入口
支持多工作进程和异步处理
"""

import os
import multiprocessing

import uvicorn
from dotenv import load_dotenv

from src.config.config import Config

# 检查 .env 文件是否存在
if os.path.exists(".env"):
    load_dotenv(".env")

# 初始化配置
config = Config()

from src.api.app import app

if __name__ == "__main__":
    # 配额计数在进程内，启用配额时默认单进程
    default_workers = 1 if config.quota_enabled else min(multiprocessing.cpu_count(), 4)
    workers = int(os.environ.get("WORKERS", default_workers))

    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
        workers=workers,  # 多工作进程
        log_level=config.log_level.lower(),
        access_log=True,
        reload=False,
        loop="uvloop",  # 使用高性能事件循环
        http="httptools"  # 使用高性能HTTP解析器
    )
