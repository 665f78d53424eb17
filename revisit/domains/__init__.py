"""도메인 패키지"""
