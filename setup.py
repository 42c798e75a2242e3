#!/usr/bin/env python3
"""
Setup script for the URL shortener package.
"""

from setuptools import setup, find_packages
import os

# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Single-user URL shortener with expiring shortcodes"

# Read requirements
def read_requirements():
    req_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    if os.path.exists(req_path):
        with open(req_path, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f if line.strip() and not line.startswith('#')]
    return []

setup(
    name="url_shortener",
    version="1.0.0",
    description="Single-user URL shortener: web form, JSON API and CLI over a local url map",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["shortener", "shortener.*", "shortener_web", "shortener_web.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Framework :: FastAPI",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "url-shortener=shortener.cli:main",
        ],
    },
    include_package_data=True,
    package_data={
        "shortener_web": [
            "templates/*.html",
        ],
    },
    keywords="url shortener, shortcode, fastapi",
)
