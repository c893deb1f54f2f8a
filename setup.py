#!/usr/bin/env python

from setuptools import setup

setup(
    name="lfsserve",
    version="0.1.0",
    description="Read-only Git LFS object server",
    packages=["lfsserve", "lfsserve.api"],
    include_package_data=True,
    zip_safe=False,
    keywords=["API", "git-lfs"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Topic :: Software Development :: Version Control :: Git",
    ],
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "starlette",
        "uvicorn",
    ],
    extras_require={
        "dev": [
            "pytest",
            "anyio",
            "httpx",
            "mypy",
            "flake8",
        ]
    },
    entry_points={
        "console_scripts": [
            "lfsserve = lfsserve.__main__:main"
        ]
    },
)
