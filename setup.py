from setuptools import setup, find_packages

setup(
    name="http-request",
    version="1.0.0",
    description="Fluent builder and executor for outbound HTTP requests",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"http_request.configs": ["config.yml"]},
    install_requires=[
        "requests",
        "typer",
        "pydantic>=2",
        "python-dotenv",
        "PyYAML",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["http-request=http_request.cli.main:app"],
    },
    python_requires=">=3.8",
)
