from setuptools import setup, find_packages

setup(
    name="frontier-portfolio",
    version="0.1.0",
    description="Sampled efficient frontier, risk-tolerance selection and Monte Carlo projection for asset portfolios",
    author="Your Name",
    packages=find_packages(include=["frontier_portfolio", "frontier_portfolio.*"]),
    install_requires=[
        "numpy>=1.25.0",
        "pandas>=1.3.0,<3",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
