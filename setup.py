from setuptools import setup, find_packages

setup(
    name="apkalign",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    # Built-in Jinja2 report templates
    package_data={
        'apkalign.utils': ['templates/*.j2'],
    },
    entry_points={
        'console_scripts': [
            'apkalign=apkalign.cli:main',
        ],
    },
    install_requires=[
        "pyelftools>=0.29",
        "Jinja2>=3.0",
    ],
    extras_require={
        'test': [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.9",
    author="apkalign",
    description="16KB page alignment report for native libraries in Android APKs",
)
