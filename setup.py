"""Setup configuration for storefront-qa package."""

from setuptools import setup, find_packages

setup(
    name="storefront-qa",
    version="0.1.0",
    description="Browser acceptance suite for the GreenKart demo storefront",
    packages=find_packages(include=["storefront_qa", "storefront_qa.*"]),
    package_data={"storefront_qa": ["data/test_data.json"]},
    python_requires=">=3.8",
    install_requires=[
        "playwright>=1.43.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.11.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "black>=23.0.0",
        ],
    },
)
