"""Setup script for the YouTube to YouTube Music playlist migrator."""

from setuptools import setup, find_namespace_packages

setup(
    name="playlistmigrator",
    version="0.1.0",
    description="Copy YouTube playlists into YouTube Music playlists",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "google-auth>=2.0.0",
        "google-auth-oauthlib>=0.4.0",
        "python-dotenv>=0.19.0",
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "uvicorn>=0.20.0",
        "tqdm>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.0.0",
            "httpx>=0.24.0",
            "httplib2>=0.19.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "playlistmigrator=playlistmigrator.cli:main",
        ]
    },
)
