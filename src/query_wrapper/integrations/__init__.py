"""
목적: 외부 시스템 통합 패키지를 제공한다.
설명: DB 통합 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/query_wrapper/integrations/db
"""
