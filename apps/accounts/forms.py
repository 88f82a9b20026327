import re

from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError


class SignupForm(UserCreationForm):
    """
    Registration form
    - email required and unique
    - username: 4-20 letters/digits
    """
    email = forms.EmailField(required=True)
    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)

    class Meta:
        model = User
        fields = ('username', 'email', 'first_name', 'last_name', 'password1', 'password2')

    def clean_username(self):
        username = self.cleaned_data.get('username')

        if len(username) < 4:
            raise ValidationError('Username must be at least 4 characters.')
        if len(username) > 20:
            raise ValidationError('Username must be at most 20 characters.')

        if not re.match(r'^[a-zA-Z0-9]+$', username):
            raise ValidationError('Username may only contain letters and digits.')

        if User.objects.filter(username__iexact=username).exists():
            raise ValidationError('This username is already taken.')

        return username

    def clean_email(self):
        email = self.cleaned_data.get('email', '').strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise ValidationError('An account with this email already exists.')
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.email = self.cleaned_data['email']
        user.first_name = self.cleaned_data.get('first_name', '')
        user.last_name = self.cleaned_data.get('last_name', '')

        if commit:
            user.save()
        return user
