from app.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    INTERNAL_SERVER_ERROR = ("서버 에러입니다.", 500)
    NOT_FOUND_DATA = ("존재하지 않는 데이터입니다", 404)
    BAD_REQUEST = ("잘못된 요청입니다", 400)

    # 스크립트 확인 실패 (재요청으로 복구 가능)
    SCRIPT_NOT_PROVIDED = ("실행할 스크립트가 제공되지 않았습니다.", 400)
    SCRIPT_NOT_FOUND = ("선택한 스크립트를 찾을 수 없습니다.", 400)
    SCRIPT_NOT_DECODABLE = ("업로드한 스크립트를 UTF-8로 읽을 수 없습니다.", 400)

    # k6 로컬 실행 실패
    K6_PROCESS_SPAWN_FAILED = ("k6 프로세스를 시작하지 못했습니다.", 500)
    K6_PROCESS_EXECUTION_FAILED = ("k6 테스트 실행에 실패했습니다.", 500)

    # k6-operator 제출 실패
    ORCHESTRATOR_SUBMISSION_FAILED = ("Kubernetes 클러스터에 테스트를 제출하지 못했습니다.", 500)

    # 분류되지 않은 실행 실패
    LOAD_TEST_FAILED = ("부하테스트 처리 중 오류가 발생했습니다.", 500)
