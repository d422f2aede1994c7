from .slideshow import *
