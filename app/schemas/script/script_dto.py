from pydantic import BaseModel


class ScriptMeta(BaseModel):
    id: str            # 파일명에서 .js를 제외한 식별자
    name: str          # 화면 표시용 이름
    filename: str
    path: str
    environment: str
    application: str
    full_id: str       # "{environment}-{application}-{id}"


class ScriptContent(BaseModel):
    content: str
    script_id: str
    environment: str
    application: str
    full_id: str


class ScriptSaveRequest(BaseModel):
    script_name: str
    content: str
    environment: str
    application: str
