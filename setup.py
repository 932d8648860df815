from setuptools import setup, find_packages

setup(
    name="simple-http-utilities",
    version="0.2.0",
    description="Async helpers for simple HTTP GET/POST/PUT request/response calls",
    author="Simple Http Utilities Team",
    packages=find_packages(include=["simple_http", "simple_http.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.2.0",
        "structlog>=23.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.10",
)
