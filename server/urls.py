"""
Main URL mapping configuration file.

Include other URLConfs from external apps using method `include()`.

It is also a good practice to keep a single URL to the root index page.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Apps:
    path('', include('server.apps.members.urls')),
    path('', include('server.apps.archive.urls')),

    # django-admin:
    path('admin/', admin.site.urls),
]
