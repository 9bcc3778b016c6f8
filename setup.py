from setuptools import setup, find_packages
import os

# Read the long description from README.md if it exists
long_description = ""
if os.path.isfile("README.md"):
    with open("README.md", "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name='monitree',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    author='monitree developers',
    description='Mirror a monitoring topology into per-container YAML configurations',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='GPLv3',
    keywords=['monitoring', 'configuration', 'yaml', 'topology'],

    # These are the runtime dependencies for your package:
    install_requires=[
        'PyYAML>=5.1',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Topic :: System :: Monitoring',
    ],

    python_requires='>=3.9',
    include_package_data=True,
    zip_safe=False,
)
