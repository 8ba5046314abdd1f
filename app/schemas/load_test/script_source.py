from typing import Optional

from pydantic import BaseModel


class StoredScriptReference(BaseModel):
    environment: str
    application: str
    script_id: str


class ScriptSource(BaseModel):
    """
    실행할 스크립트의 출처

    우선순위: 업로드 파일 > 저장된 스크립트 참조 > 인라인 스크립트
    """
    uploaded_bytes: Optional[bytes] = None
    stored_reference: Optional[StoredScriptReference] = None
    inline_text: Optional[str] = None

    @classmethod
    def from_form(cls,
                  uploaded_bytes: Optional[bytes] = None,
                  script_id: Optional[str] = None,
                  environment: Optional[str] = None,
                  application: Optional[str] = None,
                  inline_text: Optional[str] = None) -> "ScriptSource":
        """폼 필드로부터 ScriptSource 생성 (참조는 세 값이 모두 있을 때만 유효)"""
        reference = None
        if script_id and environment and application:
            reference = StoredScriptReference(
                environment=environment,
                application=application,
                script_id=script_id,
            )
        return cls(
            uploaded_bytes=uploaded_bytes or None,
            stored_reference=reference,
            inline_text=inline_text or None,
        )

    def describe(self) -> str:
        """결과에 기록할 스크립트 출처 라벨"""
        if self.uploaded_bytes:
            return "uploaded"
        if self.stored_reference:
            return self.stored_reference.script_id
        return "inline"
