from setuptools import setup, find_packages

setup(
    name="term_lessons",
    version="0.1.0",
    description="Terminal control lessons: positioned characters, key input, a moving block and colors",
    packages=find_packages(include=["term_lessons", "term_lessons.*"]),
    package_data={"term_lessons.config": ["default_config.json"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "colorama>=0.4.6",
        "pygame",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "term-lessons=term_lessons.main:main",
        ],
    },
)
