"""커맨드 라인 진입점."""
