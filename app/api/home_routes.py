from fastapi import APIRouter

router = APIRouter()

@router.get(
    path="/",
    summary = "health check",
    description = "k6 부하테스트 실행기 health check 용 엔드포인트"
)
async def home():
    return "ok"
