from setuptools import setup, find_packages

setup(
    name="llm-sdk",
    version="0.1.0",
    description="Typed async client for OpenAI-compatible chat, image, speech, whisper and embedding APIs",
    author="llm-sdk contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "httpx>=0.24",
        "pydantic>=2.0",
        "rich",
        "python-dotenv",
        "prompt_toolkit",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "llm-sdk=llm_sdk.main:main",
        ],
    },
    python_requires=">=3.9",
)
