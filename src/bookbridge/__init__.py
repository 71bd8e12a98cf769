"""BookBridge — One async book-search API over Aladin, Kakao, and Naver."""

__version__ = "0.1.0"
