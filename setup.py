from setuptools import setup, find_packages

setup(
    name="notion_html",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "notion-client>=2.2.1",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.2",
        "fastapi>=0.109.0",
        "uvicorn>=0.27.0",
        "httpx>=0.26.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.26.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "notion-html=notion_html.main:main",
        ],
    },
    python_requires=">=3.8",
)
