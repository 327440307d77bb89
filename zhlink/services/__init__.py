"""
서비스 레이어
코어 위에서 챌린지를 조립하고 외부 생성기 응답을 정리하는 모듈들
"""
