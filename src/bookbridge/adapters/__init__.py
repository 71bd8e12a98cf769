"""Provider adapter layer — One connector per external book-search API.

Built-in adapters:
  - aladin: Aladin TTB ItemSearch API (credential as a query parameter)
  - kakao: Kakao Daum book search (``KakaoAK`` authorization header)
  - naver: Naver book search (client id + client secret headers)

Every adapter subclasses ``BookSearchAdapter`` and returns a ``CallOutcome``.
"""
