from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from users.tokens import issue_access_token


class Command(BaseCommand):
    help = "Print a bearer access token for an existing user"

    def add_arguments(self, parser):
        parser.add_argument("user_id", type=int)

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(pk=options["user_id"])
        except User.DoesNotExist:
            raise CommandError(f"User {options['user_id']} does not exist")

        self.stdout.write(issue_access_token(user))
