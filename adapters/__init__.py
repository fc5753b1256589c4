"""
어댑터 레이어

외부 거래소 API와의 연동을 담당.
"""
