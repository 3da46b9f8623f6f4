"""Plugin ids and extension names shared with the host engine."""

ANDROID_LIBRARY = "com.android.library"
ANDROID_APPLICATION = "com.android.application"
KOTLIN_ANDROID = "org.jetbrains.kotlin.android"
KOTLIN_SERIALIZATION = "org.jetbrains.kotlin.plugin.serialization"
KOTLIN_COMPOSE = "org.jetbrains.kotlin.plugin.compose"
KSP = "com.google.devtools.ksp"
HILT = "dagger.hilt.android.plugin"
ROOM = "androidx.room"
OSS_LICENSES = "com.google.android.gms.oss-licenses-plugin"
BASELINE_PROFILE = "androidx.baselineprofile"
ROBORAZZI = "io.github.takahirom.roborazzi"
JACOCO = "jacoco"
APPLICATION = "application"
SPRING_BOOT = "org.springframework.boot"

# Extension names
ANDROID_EXTENSION = "android"
KOTLIN_EXTENSION = "kotlin"
KSP_EXTENSION = "ksp"
ROOM_EXTENSION = "room"
BASELINE_PROFILE_EXTENSION = "baselineProfile"
JACOCO_EXTENSION = "jacoco"
JAVA_EXTENSION = "java"
APPLICATION_EXTENSION = "application"
SPRING_BOOT_EXTENSION = "springBoot"
TESTING_EXTENSION = "testing"
