# Gunicorn 生产环境配置
import multiprocessing
import os

# 服务器套接字
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"
backlog = 2048

# 工作进程配置
# 配额计数在进程内，启用配额时默认单进程
quota_enabled = os.environ.get("QUOTA_ENABLED", "true").lower() in ("true", "1", "yes", "on")
default_workers = 1 if quota_enabled else min(multiprocessing.cpu_count(), 4)
workers = int(os.environ.get("WORKERS", default_workers))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
max_requests = 1000
max_requests_jitter = 50

# 超时配置，长文本分段并发时等待所有片段返回
timeout = 180
keepalive = 5

# 日志配置
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# 进程名称
proc_name = "humanizer-api"

# 重启配置
preload_app = True
reload = False

# 安全配置
limit_request_line = 4096
limit_request_fields = 100
limit_request_field_size = 8190
