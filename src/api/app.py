"""
FastAPI应用定义
包含所有API路由和中间件配置
"""

import logging
from datetime import datetime
from typing import Optional
from fastapi import Depends, FastAPI, Header, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config.config import Config
from ..core.exceptions import (
    AccessDeniedError,
    ConfigurationError,
    EmptyTextError,
    HumanizerError,
    QuotaExceededError,
)
from ..models.api_models import ErrorResponse, HumanizeRequest, HumanizeResponse, Provider, QuotaStatus
from .service import HumanizeService

logger = logging.getLogger(__name__)

# 创建配置实例
config = Config()

# 创建FastAPI应用
app = FastAPI(
    title="文本人性化改写API服务",
    description="基于大模型的文本改写服务，长文本分段并发处理",
    version="1.0.0"
)

# 添加CORS中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Admin-Code"],
)


# 请求日志中间件
@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """记录请求基本信息和响应状态"""
    client = f"{request.client.host}:{request.client.port}" if request.client else "Unknown"
    logger.info(f"📨 [REQUEST] {request.method} {request.url.path} 客户端: {client}, "
                f"请求体长度: {request.headers.get('content-length', '0')}")

    try:
        response = await call_next(request)
        logger.info(f"📤 [RESPONSE] 状态码: {response.status_code}")
        return response
    except Exception as e:
        logger.error(f"❌ [MIDDLEWARE ERROR] 处理请求时异常: {e}")
        logger.error(f"    异常类型: {type(e).__name__}")
        raise


# 422验证错误处理器
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422验证错误处理器 - 捕获数据验证失败"""
    logger.error(f"🚨 422 数据验证错误: {request.method} {request.url.path}")
    for error in exc.errors():
        logger.error(f"  🔸 位置: {' -> '.join(str(loc) for loc in error['loc'])}, 错误: {error['msg']}")

    return JSONResponse(
        status_code=422,
        content={
            "error": "Requête invalide",
            "details": jsonable_encoder(exc.errors()),
        }
    )


# 初始化服务
humanize_service: Optional[HumanizeService] = None


def get_humanize_service() -> HumanizeService:
    """延迟创建服务实例"""
    global humanize_service
    if humanize_service is None:
        humanize_service = HumanizeService(config)
    return humanize_service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def check_admin_code(request_body: HumanizeRequest, admin_code: Optional[str]):
    """Gemini 需要管理员访问码"""
    if request_body.settings.provider != Provider.GEMINI:
        return
    secure_code = config.admin_code
    if not secure_code or admin_code != secure_code:
        raise AccessDeniedError("🔒 Accès refusé. Code administrateur invalide.")


@app.get("/")
async def root():
    """根路径"""
    return {
        "message": "文本人性化改写API服务",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """健康检查"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.post(
    "/api/humanize",
    response_model=HumanizeResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse},
               429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def humanize_text(
    request_body: HumanizeRequest,
    x_admin_code: Optional[str] = Header(default=None),
    service: HumanizeService = Depends(get_humanize_service),
):
    """
    改写文本

    输入格式:
    {
        "text": "待改写文本",
        "settings": {"provider": "Groq", "quality": "Équilibre", "mode": "Général", "level": "Pilote automatique"}
    }
    """
    start_time = datetime.now()

    if config.debug_request_body:
        logger.info(f"🔍 [DEBUG] 请求设置: {request_body.settings.model_dump(mode='json')}")
        logger.info(f"🔍 [DEBUG] 请求文本: {request_body.text}")

    try:
        check_admin_code(request_body, x_admin_code)
        result = await service.humanize(request_body.text, request_body.settings)

    except EmptyTextError as e:
        logger.warning(f"⚠️ {e}")
        return error_response(400, str(e))
    except AccessDeniedError as e:
        logger.warning(f"⚠️ 访问被拒绝: {request_body.settings.provider.value}")
        return error_response(403, str(e))
    except QuotaExceededError as e:
        return error_response(429, str(e))
    except ConfigurationError as e:
        logger.error(f"❌ 配置错误: {e}")
        return error_response(500, str(e))
    except HumanizerError as e:
        logger.error(f"❌ API调用失败: {e}")
        logger.error(f"❌ 异常类型: {type(e).__name__}")
        return error_response(500, str(e) or "Erreur serveur interne")
    except Exception as e:
        logger.error(f"❌ 未预期的异常: {e}")
        logger.error(f"❌ 异常类型: {type(e).__name__}")
        return error_response(500, str(e) or "Erreur serveur interne")

    processing_time = (datetime.now() - start_time).total_seconds()
    logger.info(f"✅ 改写完成，耗时 {processing_time:.2f}秒")

    return HumanizeResponse(
        result=result.text,
        segment_count=result.segment_count,
        chunked=result.chunked,
        processing_time=processing_time
    )


@app.get("/api/quota", response_model=QuotaStatus)
async def get_quota(service: HumanizeService = Depends(get_humanize_service)):
    """获取每日配额使用情况"""
    return service.limiter.status()


@app.get("/api/status")
async def get_status():
    """获取服务状态"""
    return {
        "service": "Humanizer API",
        "version": "1.0.0",
        "status": "running",
        "timestamp": datetime.now().isoformat(),
        "chunk_threshold": config.chunk_threshold,
        "providers": {
            Provider.GROQ.value: bool(config.groq_api_key),
            Provider.GEMINI.value: bool(config.gemini_api_key),
        }
    }
