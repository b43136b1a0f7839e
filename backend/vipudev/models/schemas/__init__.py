"""API schemas."""

from vipudev.models.schemas.base import CamelModel, SuccessResponse
from vipudev.models.schemas.auth import (
    LoginRequest,
    LoginResponse,
    VerifyResponse,
    MessageResponse,
)
from vipudev.models.schemas.project import (
    ProjectFile,
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectEnvelope,
    ProjectListResponse,
)
from vipudev.models.schemas.chat import (
    ChatMessageCreate,
    ChatMessageResponse,
    ChatMessageEnvelope,
    ChatHistoryResponse,
)
from vipudev.models.schemas.execution import (
    CodeExecutionCreate,
    CodeExecutionResponse,
    CodeExecutionEnvelope,
    CodeExecutionListResponse,
)
from vipudev.models.schemas.config import (
    UserConfigUpdate,
    UserConfigResponse,
    UserConfigEnvelope,
)
from vipudev.models.schemas.assistant import (
    AssistantMessage,
    AssistantChatRequest,
    AssistantChatResponse,
    AnalyzeZipResponse,
    ImageGenerationRequest,
    ImageGenerationResponse,
)
from vipudev.models.schemas.sandbox import (
    RunCodeRequest,
    RunCodeResponse,
    SandboxFile,
    RunProjectRequest,
    RunProjectResponse,
    ZipCodeRequest,
    DeployRequest,
    DeployResponse,
)

__all__ = [
    "CamelModel",
    "SuccessResponse",
    "LoginRequest",
    "LoginResponse",
    "VerifyResponse",
    "MessageResponse",
    "ProjectFile",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectEnvelope",
    "ProjectListResponse",
    "ChatMessageCreate",
    "ChatMessageResponse",
    "ChatMessageEnvelope",
    "ChatHistoryResponse",
    "CodeExecutionCreate",
    "CodeExecutionResponse",
    "CodeExecutionEnvelope",
    "CodeExecutionListResponse",
    "UserConfigUpdate",
    "UserConfigResponse",
    "UserConfigEnvelope",
    "AssistantMessage",
    "AssistantChatRequest",
    "AssistantChatResponse",
    "AnalyzeZipResponse",
    "ImageGenerationRequest",
    "ImageGenerationResponse",
    "RunCodeRequest",
    "RunCodeResponse",
    "SandboxFile",
    "RunProjectRequest",
    "RunProjectResponse",
    "ZipCodeRequest",
    "DeployRequest",
    "DeployResponse",
]
