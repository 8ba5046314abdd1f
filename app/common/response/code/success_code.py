from app.common.response.code.base_code import BaseCode

class SuccessCode(BaseCode):
    SUCCESS_CODE = ("요청 처리에 성공하였습니다.", 200)
    CREATED = ("리소스를 정상적으로 생성하였습니다.", 201)
    TEST_COMPLETED = ("부하테스트가 정상적으로 완료되었습니다.", 200)
    TEST_THRESHOLD_VIOLATED = ("부하테스트가 완료되었으나 임계값을 위반하였습니다.", 200)
    TEST_SUBMITTED = ("부하테스트가 Kubernetes 클러스터에 제출되었습니다.", 200)
