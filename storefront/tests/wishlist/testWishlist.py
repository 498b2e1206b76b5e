from django.contrib.auth.models import User
from django.test import TestCase
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from storefront.exceptions import CourseAlreadyInWishlist
from storefront.wishlist import services
from storefront.wishlist.models import WishlistItem


class WishlistServiceTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(username="alice", email="a@x.com", password="secret")
        cls.other = User.objects.create_user(username="bob", email="b@x.com", password="secret")

    def course_ids(self, items):
        return [item.course_id for item in items]

    def test_add_keeps_insertion_order(self):
        services.add_item(self.user, "C1", "Intro")
        items = services.add_item(self.user, "C2", "Advanced")
        self.assertEqual(self.course_ids(items), ["C1", "C2"])
        self.assertEqual(items[1].title, "Advanced")

    def test_add_duplicate_raises(self):
        services.add_item(self.user, "C1", "Intro")
        with self.assertRaises(CourseAlreadyInWishlist):
            services.add_item(self.user, "C1", "Intro again")
        self.assertEqual(WishlistItem.objects.filter(user=self.user, course_id="C1").count(), 1)

    def test_same_course_for_different_users(self):
        services.add_item(self.user, "C1", "Intro")
        items = services.add_item(self.other, "C1", "Intro")
        self.assertEqual(self.course_ids(items), ["C1"])

    def test_remove_is_idempotent(self):
        services.add_item(self.user, "C1", "Intro")
        services.add_item(self.user, "C2", "Advanced")

        once = services.remove_item(self.user, "C1")
        twice = services.remove_item(self.user, "C1")
        self.assertEqual(self.course_ids(once), ["C2"])
        self.assertEqual(self.course_ids(twice), ["C2"])

    def test_remove_absent_course(self):
        self.assertEqual(services.remove_item(self.user, "missing"), [])

    def test_mixed_sequence_keeps_course_ids_unique(self):
        operations = [
            ("add", "C1"), ("add", "C2"), ("remove", "C1"), ("add", "C1"),
            ("add", "C2"), ("remove", "C3"), ("add", "C3"), ("add", "C1"),
        ]
        for op, course_id in operations:
            if op == "add":
                try:
                    services.add_item(self.user, course_id, f"Course {course_id}")
                except CourseAlreadyInWishlist:
                    pass
            else:
                services.remove_item(self.user, course_id)

        ids = self.course_ids(services.list_items(self.user))
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(ids, ["C2", "C1", "C3"])


class WishlistViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(username="alice", email="a@x.com", password="secret")

    def setUp(self):
        self.auth = {"HTTP_AUTHORIZATION": f"Bearer {AccessToken.for_user(self.user)}"}

    def add(self, **data):
        return self.client.post("/wishlist", data, content_type="application/json", **self.auth)

    def test_empty_wishlist(self):
        response = self.client.get("/wishlist", **self.auth)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    def test_add_and_list(self):
        response = self.add(courseId="C1", title="Intro")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [{"courseId": "C1", "title": "Intro"}])

        response = self.client.get("/wishlist", **self.auth)
        self.assertEqual(response.json(), [{"courseId": "C1", "title": "Intro"}])

    def test_add_duplicate(self):
        self.add(courseId="C1", title="Intro")
        response = self.add(courseId="C1", title="Intro")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"message": "Course already in wishlist"})

    def test_add_missing_title(self):
        response = self.add(courseId="C1")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("errors", response.json())
        self.assertFalse(WishlistItem.objects.exists())

    def test_delete(self):
        self.add(courseId="C1", title="Intro")
        self.add(courseId="C2", title="Advanced")

        response = self.client.delete("/wishlist/C1", **self.auth)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [{"courseId": "C2", "title": "Advanced"}])

        response = self.client.delete("/wishlist/C1", **self.auth)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [{"courseId": "C2", "title": "Advanced"}])

    def test_requires_token(self):
        self.assertEqual(self.client.get("/wishlist").status_code, status.HTTP_401_UNAUTHORIZED)
        response = self.client.post(
            "/wishlist", {"courseId": "C1", "title": "Intro"}, content_type="application/json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(self.client.delete("/wishlist/C1").status_code, status.HTTP_401_UNAUTHORIZED)


class WalkthroughTests(TestCase):
    """Signup, login and wishlist round trip as a frontend would drive it."""

    def test_signup_login_wishlist(self):
        post = lambda url, data, **extra: self.client.post(url, data, content_type="application/json", **extra)

        response = post("/signup", {"username": "alice", "email": "a@x.com", "password": "secret"})
        self.assertEqual(response.status_code, 201)

        response = post("/signup", {"username": "alice", "email": "a@x.com", "password": "secret"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "User already exists")

        response = post("/login", {"username": "alice", "password": "secret"})
        self.assertEqual(response.status_code, 200)
        auth = {"HTTP_AUTHORIZATION": f"Bearer {response.json()['token']}"}

        response = post("/wishlist", {"courseId": "C1", "title": "Intro"}, **auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [{"courseId": "C1", "title": "Intro"}])

        response = post("/wishlist", {"courseId": "C1", "title": "Intro"}, **auth)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Course already in wishlist")

        response = self.client.delete("/wishlist/C1", **auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])
