"""
Setup script for the WiFi Mirror screen-capture session shell.
"""

from setuptools import setup, find_packages

setup(
    name="wifi-mirror-capture",
    version="0.1.0",
    description="Screen-capture permission and foreground session lifecycle for WiFi Mirror",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="WiFi Mirror Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wifi-mirror=wifi_mirror.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
