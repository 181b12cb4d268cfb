from setuptools import setup, find_packages

setup(
    name="css-variable-search",
    version="1.0.0",
    packages=find_packages(include=['css_variables', 'css_variables.*']),
    install_requires=[
        'requests',
        'urllib3',
        'validators>=0.21',
        'webcolors',
        'colorama',
        'orjson'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
            'pytest-xdist'
        ]
    },
    entry_points={
        'console_scripts': [
            'css-variables=css_variables.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Extract, categorize and search CSS custom properties from local or remote stylesheets",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
