from setuptools import setup, find_packages

setup(
    name="airport-live",
    version="0.1.0",
    packages=find_packages(include=["airport_live", "airport_live.*"]),
    install_requires=[
        "requests>=2.25.1",
        "fastapi>=0.100.0",
        "uvicorn>=0.20.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "httpx>=0.24.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "airport-live=airport_live.cli:main",
        ],
    },
    description="Live airport operations: stand occupancy, runway advisory, traffic and decoded weather",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
)
