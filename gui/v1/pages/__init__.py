from .greeting_page import GreetingPage
from .profile_page import ProfilePage, build_profile_page

__all__ = ['GreetingPage', 'ProfilePage', 'build_profile_page']
