"""Revisit: 방문 기록 기반 재방문 추천 엔진"""
