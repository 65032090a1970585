from setuptools import setup, find_packages


setup(
    name='mocktree',
    url='http://github.com/alecthomas/mocktree',
    download_url='http://github.com/alecthomas/mocktree',
    version='0.1',
    description='Lazily built, arbitrarily deep mock objects for Python tests.',
    license='BSD',
    platforms=['any'],
    packages=find_packages(),
    author='Alec Thomas',
    author_email='alec@swapoff.org',
    python_requires='>=3.8',
    install_requires=[
        'mock >= 4.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    )
