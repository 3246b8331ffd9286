from setuptools import setup, find_packages


setup(
    version="0.1.0",
    name="httpassist",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "multidict>=5.0",
        "yarl>=1.6",
        "aiohttp>=3.8",
        "pydantic>=2.4",
    ],
    extras_require={
        "httpx": ["httpx>=0.24"],
        "test": [
            "pytest>=7",
            "pytest-asyncio>=0.21",
            "httpx>=0.24",
        ],
    },
)
