from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="ethverify",
        version="0.1.0",
        description="Ethereum signed-message verification and trusted-signer registry",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.10",
        install_requires=[
            "eth-hash[pycryptodome]>=0.5",
            "eth-keys>=0.4",
            "eth-utils>=2.0",
            "structlog>=22.1",
        ],
        extras_require={
            "test": ["pytest>=7"],
        },
    )
