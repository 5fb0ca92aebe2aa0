"""Setup script for citydesigner package."""

from setuptools import find_packages, setup

setup(
    name='citydesigner',
    version='0.1.0',
    author='CityDesigner Team',
    author_email='example@example.com',
    description='Procedural generation of 2D city layouts: roads, parks, fountain and buildings',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/example/citydesigner',
    packages=find_packages(include=['citydesigner', 'citydesigner.*']),
    include_package_data=True,
    package_data={
        'citydesigner.config': ['*.yaml'],
        'citydesigner.data': ['*.json'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'pyyaml',
        'pillow',
    ],
    extras_require={
        'dev': [
            'pytest',
            'flake8',
            'black',
        ],
    },
)
