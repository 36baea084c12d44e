"""포트 구현체 인프라 레이어."""
