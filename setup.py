from setuptools import setup, find_packages

setup(
    name="faa_navdata",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests>=2.25.1",
        "pandas>=1.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "build-airports=faa_navdata.cli:build_airports_main",
            "build-navaids=faa_navdata.cli:build_navaids_main",
            "build-airways=faa_navdata.cli:build_airways_main",
            "build-fixes=faa_navdata.cli:build_fixes_main",
        ]
    },
    description="Offline builder for US airport, navaid, airway and named-fix reference databases",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
