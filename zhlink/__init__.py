"""
zhlink - 중국어 두 단계 연결(Core+Core) 문항 생성/채점 서비스
"""
__version__ = "0.1.0"
