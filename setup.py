from setuptools import find_packages, setup

setup(
    name="vscode-marketplace-client",
    version="0.1.0",
    description="Query the Visual Studio Marketplace and download VSIX packages",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "requests",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "vscode-marketplace=vscode_marketplace.cli:main",
        ],
    },
)
