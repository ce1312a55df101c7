"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='eel-lang',
	version='1.2.0',
	packages=['eelang', ],
	entry_points={
		'console_scripts': ["eel = eelang.cmdline:main"],
	},
	license='MIT',
	description='The Easily Extendable Language: a tiny embeddable scripting language where everything is text',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Interpreters",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
