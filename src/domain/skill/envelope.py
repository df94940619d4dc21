"""Request Envelope"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    field_validator,
)

from .errors import MalformedRequest


class SkillModel(BaseModel):
    """プラットフォームの JSON (camelCase) を読み書きするモデルの基底"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class RequestType(str, Enum):
    """リクエスト種別"""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class DialogState(str, Enum):
    """プラットフォーム側のスロット収集の進捗"""

    STARTED = "STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Slot(SkillModel):
    """インテントのスロット"""

    name: str
    value: str | None = None
    confirmation_status: str = Field(default="NONE", alias="confirmationStatus")


class Intent(SkillModel):
    """インテント"""

    name: str = Field(min_length=1)
    slots: dict[str, Slot] = Field(default_factory=dict)
    confirmation_status: str = Field(default="NONE", alias="confirmationStatus")

    @field_validator("slots", mode="before")
    @classmethod
    def _name_slots(cls, value: Any) -> Any:
        """スロット名が省略されていればキーで補う"""
        if not value:
            return {}
        if not isinstance(value, dict):
            return value
        return {
            key: {"name": key, **slot} if isinstance(slot, dict) else slot
            for key, slot in value.items()
        }

    def slot_value(self, slot_name: str) -> str | None:
        """スロット値を取得（未入力なら None）"""
        slot = self.slots.get(slot_name)
        return slot.value if slot else None


class _RequestFields(SkillModel):
    request_id: str = Field(default="", alias="requestId")
    timestamp: str = ""
    locale: str | None = None


class LaunchRequest(_RequestFields):
    """スキル起動リクエスト"""

    type: Literal["LaunchRequest"] = "LaunchRequest"


class IntentRequest(_RequestFields):
    """インテントリクエスト"""

    type: Literal["IntentRequest"] = "IntentRequest"
    intent: Intent
    dialog_state: DialogState | None = Field(default=None, alias="dialogState")


class SessionEndedRequest(_RequestFields):
    """セッション終了リクエスト"""

    type: Literal["SessionEndedRequest"] = "SessionEndedRequest"
    reason: str = ""
    error: dict[str, Any] | None = None


class Request(_RequestFields):
    """
    上記以外の種別のリクエスト

    ディスパッチャで未処理として扱うため、種別だけ保持する。
    """

    type: str = Field(min_length=1)


_UNKNOWN_TAG = "unknown"


def _request_tag(value: Any) -> str:
    request_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    known = {item.value for item in RequestType}
    return request_type if request_type in known else _UNKNOWN_TAG


AnyRequest = Annotated[
    Union[
        Annotated[LaunchRequest, Tag(RequestType.LAUNCH.value)],
        Annotated[IntentRequest, Tag(RequestType.INTENT.value)],
        Annotated[SessionEndedRequest, Tag(RequestType.SESSION_ENDED.value)],
        Annotated[Request, Tag(_UNKNOWN_TAG)],
    ],
    Discriminator(_request_tag),
]


class User(SkillModel):
    user_id: str | None = Field(default=None, alias="userId")


class Application(SkillModel):
    application_id: str | None = Field(default=None, alias="applicationId")


class Session(SkillModel):
    session_id: str | None = Field(default=None, alias="sessionId")
    new: bool = False
    user: User | None = None
    application: Application | None = None


class SystemState(SkillModel):
    user: User | None = None
    application: Application | None = None


class Context(SkillModel):
    system: SystemState | None = Field(default=None, alias="System")


class RequestEnvelope(SkillModel):
    """
    音声プラットフォームから届くリクエストエンベロープ

    1ターン分のリクエスト、セッション情報、ユーザー識別子を保持する。
    ユーザーIDは context.System を優先し、無ければ session から取る。
    """

    version: str = "1.0"
    session: Session | None = None
    context: Context | None = None
    request: AnyRequest

    @property
    def request_type(self) -> str:
        return self.request.type

    @property
    def intent_name(self) -> str | None:
        if isinstance(self.request, IntentRequest):
            return self.request.intent.name
        return None

    @property
    def session_id(self) -> str | None:
        return self.session.session_id if self.session else None

    @property
    def new_session(self) -> bool:
        return bool(self.session and self.session.new)

    @property
    def user_id(self) -> str | None:
        system = self.context.system if self.context else None
        if system and system.user and system.user.user_id:
            return system.user.user_id
        if self.session and self.session.user:
            return self.session.user.user_id
        return None

    @property
    def application_id(self) -> str | None:
        system = self.context.system if self.context else None
        if system and system.application and system.application.application_id:
            return system.application.application_id
        if self.session and self.session.application:
            return self.session.application.application_id
        return None

    def require_user_id(self) -> str:
        """永続化に使うユーザーIDを取得"""
        if not self.user_id:
            raise MalformedRequest("Request envelope carries no user id")
        return self.user_id

    @classmethod
    def from_event(cls, event: Any) -> RequestEnvelope:
        """JSON エンベロープを検証して生成"""
        try:
            return cls.model_validate(event)
        except ValidationError as e:
            raise MalformedRequest(f"Invalid request envelope: {e}") from e
