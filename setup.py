from setuptools import setup, find_packages

if __name__ == '__main__':
    setup(
        name='accelgate',
        version='0.1.0',
        author='Michael Gilbert, Tanner Andrulis',
        author_email='gilbertm@mit.edu, andrulis@mit.edu',
        install_requires=[
            'pydantic>=2',
            'ruamel.yaml',
            'platformdirs',
            'joblib',
        ],
        extras_require={
            'test': ['pytest'],
        },
        packages=find_packages(include=['accelgate', 'accelgate.*']),
        python_requires='>=3.10',
        zip_safe=True,
        entry_points={
            'console_scripts': []
        }
    )
